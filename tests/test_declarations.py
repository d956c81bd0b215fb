from vixlint.analysis import (
    DeclarationKind,
    NamingStyle,
    classify_naming_style,
    collect_declarations,
    to_lower_snake,
    to_upper_snake,
)
from vixlint.lexer import tokenize_source


def declarations_of(source: str):
    return collect_declarations(tokenize_source(source))


def test_classify_naming_style_examples() -> None:
    assert classify_naming_style("MAX") is NamingStyle.UPPER_SNAKE
    assert classify_naming_style("MAX_USERS") is NamingStyle.UPPER_SNAKE
    assert classify_naming_style("HTTP2_PORT") is NamingStyle.UPPER_SNAKE
    assert classify_naming_style("max_users") is NamingStyle.LOWER_SNAKE
    assert classify_naming_style("maxUsers") is NamingStyle.CAMEL
    assert classify_naming_style("MaxUsers") is NamingStyle.PASCAL
    assert classify_naming_style("Max_Users") is NamingStyle.MIXED


def test_classify_ignores_leading_underscores_and_letterless_names() -> None:
    assert classify_naming_style("_private") is NamingStyle.LOWER_SNAKE
    assert classify_naming_style("__MAX") is NamingStyle.UPPER_SNAKE
    assert classify_naming_style("_") is NamingStyle.LOWER_SNAKE
    assert classify_naming_style("_1") is NamingStyle.LOWER_SNAKE


def test_classify_allows_repeated_and_trailing_underscores() -> None:
    assert classify_naming_style("MAX__USERS") is NamingStyle.UPPER_SNAKE
    assert classify_naming_style("MAX_") is NamingStyle.UPPER_SNAKE
    assert classify_naming_style("a__b") is NamingStyle.LOWER_SNAKE
    assert classify_naming_style("MAX__users") is NamingStyle.MIXED


def test_classify_non_ascii_letters_by_case() -> None:
    assert classify_naming_style("café") is NamingStyle.LOWER_SNAKE
    assert classify_naming_style("ÉTAT_MAX") is NamingStyle.UPPER_SNAKE
    assert classify_naming_style("Café") is NamingStyle.PASCAL
    assert classify_naming_style("grüßGott") is NamingStyle.CAMEL
    assert classify_naming_style("名前") is NamingStyle.LOWER_SNAKE


def test_name_conversions_for_hints() -> None:
    assert to_upper_snake("maxUsers") == "MAX_USERS"
    assert to_upper_snake("HTTPServer") == "HTTP_SERVER"
    assert to_lower_snake("UserName") == "user_name"
    assert to_lower_snake("USER_NAME") == "user_name"
    assert to_lower_snake("_cacheSize") == "_cache_size"


def test_collects_each_declaration_keyword() -> None:
    declarations, malformed = declarations_of(
        "const LIMIT = 1\nstatic counter = 0\nvar name = 1\nlet other = 2\nfunc run_all()\nend\n"
    )

    assert malformed == ()
    assert [(d.name, d.declared_kind, d.keyword) for d in declarations] == [
        ("LIMIT", DeclarationKind.CONSTANT, "const"),
        ("counter", DeclarationKind.STATIC, "static"),
        ("name", DeclarationKind.VARIABLE, "var"),
        ("other", DeclarationKind.VARIABLE, "let"),
        ("run_all", DeclarationKind.FUNCTION, "func"),
    ]
    assert (declarations[1].line, declarations[1].column) == (2, 8)


def test_static_var_is_a_single_static_declaration() -> None:
    declarations, _ = declarations_of("static var cacheSize = 8\nstatic const LIMIT = 1\n")

    assert [(d.name, d.declared_kind) for d in declarations] == [
        ("cacheSize", DeclarationKind.STATIC),
        ("LIMIT", DeclarationKind.STATIC),
    ]


def test_static_func_is_a_function() -> None:
    declarations, _ = declarations_of("static func makeThing()\nend\n")

    assert [(d.name, d.declared_kind, d.keyword) for d in declarations] == [
        ("makeThing", DeclarationKind.FUNCTION, "func"),
    ]


def test_var_mut_and_comma_separated_names() -> None:
    declarations, _ = declarations_of("var mut total = 0\nvar a, bB = 1, 2\n")

    assert [d.name for d in declarations] == ["total", "a", "bB"]
    assert declarations[2].naming_style is NamingStyle.CAMEL


def test_anonymous_function_is_not_a_declaration() -> None:
    declarations, malformed = declarations_of("var handler = func(x)\n    return x\nend\n")

    assert [d.name for d in declarations] == ["handler"]
    assert malformed == ()


def test_declaration_keyword_in_string_or_comment_is_ignored() -> None:
    declarations, _ = declarations_of('log("const badName = 1") // var alsoBad\n')

    assert declarations == ()


def test_malformed_declarations_are_reported_not_collected() -> None:
    declarations, malformed = declarations_of("var = 5\nconst\n")

    assert declarations == ()
    assert [(m.keyword, m.line, m.column, m.found) for m in malformed] == [
        ("var", 1, 1, "="),
        ("const", 2, 1, None),
    ]
