"""Text rendering shared by the codecs' property rows."""


def fmt_flag(b: bool) -> str:
    return "true" if b else "false"
