from flexaxis.types import Color


############################# Colors #####################################
def to_hex(color: Color | str) -> str:
    """
    Any color pygame understands to "#rrggbbaa"
    ("#rrggbb" if the color is opaque)
    """
    color = Color(color)
    rgb = f"#{color.r:02x}{color.g:02x}{color.b:02x}"
    return rgb if color.a == 255 else f"{rgb}{color.a:02x}"
