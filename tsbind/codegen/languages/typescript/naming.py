"""
TypeScript-specific naming utilities.

Handles TypeScript reserved words and globals that generated bindings
should not shadow.
"""

from ...core.naming import NameChecker


# TypeScript reserved words (strict mode)
TS_RESERVED_WORDS = {
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "debugger",
    "default",
    "delete",
    "do",
    "else",
    "enum",
    "export",
    "extends",
    "false",
    "finally",
    "for",
    "function",
    "if",
    "implements",
    "import",
    "in",
    "instanceof",
    "interface",
    "let",
    "new",
    "null",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "static",
    "super",
    "switch",
    "this",
    "throw",
    "true",
    "try",
    "typeof",
    "var",
    "void",
    "while",
    "with",
    "yield",
}

# Names declared by the runtime globals block
TS_BUILTIN_NAMES = {
    "TAURI_INVOKE",
    "TAURI_API_EVENT",
    "Result",
    "commands",
    "events",
    "__makeEvents__",
}


def create_typescript_checker() -> NameChecker:
    """Create a name checker configured for TypeScript."""
    return NameChecker(TS_RESERVED_WORDS, TS_BUILTIN_NAMES)
