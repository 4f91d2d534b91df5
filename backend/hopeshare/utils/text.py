from markupsafe import Markup


def plain_text(value) -> str:
    """Rich-text (HTML) content reduced to its visible text."""
    if not value:
        return ""
    return Markup(str(value)).striptags()
