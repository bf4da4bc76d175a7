"""
The parsing of caller-supplied declarations, independent of the axis specs
"""
import tinycss
import tinycss.token_data

from flexaxis.utils import log_error


class CustomCSSParser(tinycss.CSS21Parser):
    def parse_declaration(self, tokens: list[tinycss.token_data.Token]):
        # custom properties like
        # --my-custom-property: 10px
        if len(tokens) >= 2:
            first_token, second_token, *rest = tokens
            if first_token.value == "-" and second_token.type == "IDENT":
                value = first_token.value + second_token.value
                tokens = [
                    tinycss.token_data.Token(
                        "IDENT", value, value, None, first_token.line, first_token.column
                    ),
                    *rest,
                ]
        return super().parse_declaration(tokens)


Parser = CustomCSSParser()


def parse_inline_style(s: str) -> dict[str, str]:
    """
    Parse a style string like the one in a style attribute.
    Invalid declarations are logged and skipped.
    """
    if not s:
        return {}
    declarations, errors = Parser.parse_style_attr(s)
    for error in errors:
        log_error(f"CSS: {error}")
    return {decl.name: decl.value.as_css().strip() for decl in declarations}
