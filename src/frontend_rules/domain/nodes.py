"""ESTree node wrapper. Pure domain data, no I/O."""

from collections.abc import Iterator, Mapping
from typing import Any, ClassVar, Optional

# Child order per node type, following eslint-visitor-keys. Types missing from
# the table fall back to field order of the serialized node.
VISITOR_KEYS: dict[str, tuple[str, ...]] = {
    "Program": ("body",),
    "ExpressionStatement": ("expression",),
    "BlockStatement": ("body",),
    "StaticBlock": ("body",),
    "EmptyStatement": (),
    "DebuggerStatement": (),
    "ReturnStatement": ("argument",),
    "ThrowStatement": ("argument",),
    "IfStatement": ("test", "consequent", "alternate"),
    "SwitchStatement": ("discriminant", "cases"),
    "SwitchCase": ("test", "consequent"),
    "WhileStatement": ("test", "body"),
    "DoWhileStatement": ("body", "test"),
    "ForStatement": ("init", "test", "update", "body"),
    "ForInStatement": ("left", "right", "body"),
    "ForOfStatement": ("left", "right", "body"),
    "TryStatement": ("block", "handler", "finalizer"),
    "CatchClause": ("param", "body"),
    "LabeledStatement": ("label", "body"),
    "BreakStatement": ("label",),
    "ContinueStatement": ("label",),
    "VariableDeclaration": ("declarations",),
    "VariableDeclarator": ("id", "init"),
    "FunctionDeclaration": ("id", "typeParameters", "params", "returnType", "body"),
    "FunctionExpression": ("id", "typeParameters", "params", "returnType", "body"),
    "ArrowFunctionExpression": ("typeParameters", "params", "returnType", "body"),
    "ClassDeclaration": ("decorators", "id", "typeParameters", "superClass", "implements", "body"),
    "ClassExpression": ("decorators", "id", "typeParameters", "superClass", "implements", "body"),
    "ClassBody": ("body",),
    "MethodDefinition": ("decorators", "key", "value"),
    "PropertyDefinition": ("decorators", "key", "typeAnnotation", "value"),
    "ImportDeclaration": ("specifiers", "source"),
    "ImportSpecifier": ("imported", "local"),
    "ImportDefaultSpecifier": ("local",),
    "ImportNamespaceSpecifier": ("local",),
    "ExportNamedDeclaration": ("declaration", "specifiers", "source"),
    "ExportDefaultDeclaration": ("declaration",),
    "ExportAllDeclaration": ("exported", "source"),
    "ExportSpecifier": ("local", "exported"),
    "Identifier": ("decorators", "typeAnnotation"),
    "Literal": (),
    "TemplateLiteral": ("quasis", "expressions"),
    "TemplateElement": (),
    "TaggedTemplateExpression": ("tag", "quasi"),
    "ObjectExpression": ("properties",),
    "ObjectPattern": ("properties", "typeAnnotation"),
    "ArrayExpression": ("elements",),
    "ArrayPattern": ("elements", "typeAnnotation"),
    "Property": ("key", "value"),
    "SpreadElement": ("argument",),
    "RestElement": ("argument", "typeAnnotation"),
    "AssignmentPattern": ("left", "right"),
    "CallExpression": ("callee", "typeArguments", "arguments"),
    "NewExpression": ("callee", "typeArguments", "arguments"),
    "MemberExpression": ("object", "property"),
    "ChainExpression": ("expression",),
    "ConditionalExpression": ("test", "consequent", "alternate"),
    "LogicalExpression": ("left", "right"),
    "BinaryExpression": ("left", "right"),
    "AssignmentExpression": ("left", "right"),
    "UnaryExpression": ("argument",),
    "UpdateExpression": ("argument",),
    "AwaitExpression": ("argument",),
    "YieldExpression": ("argument",),
    "SequenceExpression": ("expressions",),
    "ThisExpression": (),
    "Super": (),
    "JSXElement": ("openingElement", "children", "closingElement"),
    "JSXFragment": ("openingFragment", "children", "closingFragment"),
    "JSXOpeningElement": ("name", "typeArguments", "attributes"),
    "JSXClosingElement": ("name",),
    "JSXOpeningFragment": (),
    "JSXClosingFragment": (),
    "JSXAttribute": ("name", "value"),
    "JSXSpreadAttribute": ("argument",),
    "JSXExpressionContainer": ("expression",),
    "JSXEmptyExpression": (),
    "JSXSpreadChild": ("expression",),
    "JSXText": (),
    "JSXIdentifier": (),
    "JSXMemberExpression": ("object", "property"),
    "JSXNamespacedName": ("namespace", "name"),
    "TSInterfaceDeclaration": ("id", "typeParameters", "extends", "body"),
    "TSInterfaceBody": ("body",),
    "TSTypeAliasDeclaration": ("id", "typeParameters", "typeAnnotation"),
    "TSTypeLiteral": ("members",),
    "TSPropertySignature": ("key", "typeAnnotation"),
    "TSMethodSignature": ("key", "typeParameters", "params", "returnType"),
    "TSTypeAnnotation": ("typeAnnotation",),
    "TSAsExpression": ("expression", "typeAnnotation"),
    "TSNonNullExpression": ("expression",),
    "TSEnumDeclaration": ("id", "members"),
    "TSEnumMember": ("id", "initializer"),
    "TSModuleDeclaration": ("id", "body"),
    "TSModuleBlock": ("body",),
}

# Serialized fields that are never child nodes.
NON_CHILD_KEYS: frozenset[str] = frozenset(
    {"type", "parent", "loc", "range", "start", "end", "comments", "tokens"}
)

# Nodes are wrapped but these fields are kept verbatim.
_RAW_KEYS: frozenset[str] = frozenset({"comments", "tokens", "loc", "range"})


class Node:
    """
    One ESTree node with a parent link.

    Fields are exposed as attributes; a field the node does not carry reads as
    None so rules can treat unusual shapes as a non-match.
    """

    __slots__ = ("type", "parent", "_fields")

    _EXPORT_TYPES: ClassVar[frozenset[str]] = frozenset(
        {"ExportNamedDeclaration", "ExportDefaultDeclaration"}
    )

    def __init__(self, data: Mapping[str, Any], parent: Optional["Node"] = None) -> None:
        self._attach(data, parent)
        # Worklist instead of recursion: long operator chains nest thousands deep.
        pending: list[tuple[Node, Mapping[str, Any]]] = [(self, data)]
        while pending:
            node, source = pending.pop()
            for key, value in source.items():
                if key in ("type", "parent"):
                    continue
                node._fields[key] = value if key in _RAW_KEYS else node._adopt(value, pending)

    def _attach(self, data: Mapping[str, Any], parent: Optional["Node"]) -> None:
        self.type: str = str(data["type"])
        self.parent = parent
        self._fields: dict[str, Any] = {}

    def _adopt(self, value: Any, pending: list[tuple["Node", Mapping[str, Any]]]) -> Any:
        if isinstance(value, Mapping) and "type" in value:
            child = Node.__new__(Node)
            child._attach(value, self)
            pending.append((child, value))
            return child
        if isinstance(value, list):
            return [self._adopt(item, pending) for item in value]
        return value

    @classmethod
    def from_estree(cls, data: Mapping[str, Any]) -> "Node":
        """Wrap a serialized ESTree root (usually a Program)."""
        return cls(data)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self._fields.get(name)

    def __repr__(self) -> str:
        return f"<Node {self.type} at {self.start}>"

    def get(self, name: str, default: Any = None) -> Any:
        """Return a field value, or default when the node has no such field."""
        return self._fields.get(name, default)

    @property
    def fields(self) -> Mapping[str, Any]:
        return self._fields

    @property
    def name_text(self) -> str | None:
        """The `name` field when it is a plain string (Identifier, JSXIdentifier)."""
        value = self._fields.get("name")
        return value if isinstance(value, str) else None

    @property
    def start(self) -> int | None:
        node_range = self._fields.get("range")
        if isinstance(node_range, (list, tuple)) and len(node_range) == 2:
            return int(node_range[0])
        start = self._fields.get("start")
        return start if isinstance(start, int) else None

    @property
    def end(self) -> int | None:
        node_range = self._fields.get("range")
        if isinstance(node_range, (list, tuple)) and len(node_range) == 2:
            return int(node_range[1])
        end = self._fields.get("end")
        return end if isinstance(end, int) else None

    @property
    def line(self) -> int | None:
        """1-based start line from `loc`, if the parser recorded it."""
        loc = self._fields.get("loc")
        if isinstance(loc, Mapping) and isinstance(loc.get("start"), Mapping):
            line = loc["start"].get("line")
            return line if isinstance(line, int) else None
        return None

    @property
    def column(self) -> int | None:
        """0-based start column from `loc`, if the parser recorded it."""
        loc = self._fields.get("loc")
        if isinstance(loc, Mapping) and isinstance(loc.get("start"), Mapping):
            column = loc["start"].get("column")
            return column if isinstance(column, int) else None
        return None

    def child_keys(self) -> tuple[str, ...]:
        keys = VISITOR_KEYS.get(self.type)
        if keys is not None:
            return keys
        return tuple(key for key in self._fields if key not in NON_CHILD_KEYS)

    def child_nodes(self) -> Iterator["Node"]:
        """Yield direct child nodes in traversal order."""
        for key in self.child_keys():
            value = self._fields.get(key)
            if isinstance(value, Node):
                yield value
            elif isinstance(value, list):
                for item in value:
                    if isinstance(item, Node):
                        yield item

    def is_export_declaration(self) -> bool:
        return self.type in self._EXPORT_TYPES
