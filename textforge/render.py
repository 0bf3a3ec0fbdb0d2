import click

# Background colours cycled by source index.
SOURCE_COLORS = (
    'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white',
    'bright_black', 'bright_red', 'bright_green', 'bright_yellow',
    'bright_blue', 'bright_magenta', 'bright_cyan',
)


def source_color(source):
    return SOURCE_COLORS[source % len(SOURCE_COLORS)]


def render_tokens(tokens, color=False):
    """Joins tokens with single spaces, optionally colouring each by its source."""
    if not color:
        return ' '.join(tokens)
    return ' '.join(click.style(str(token), bg=source_color(token.source)) for token in tokens)
