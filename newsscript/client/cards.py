"""Plain-text rendering of story cards."""

from ..schemas import Story

RULE = "-" * 60


def render_card(story: Story) -> str:
    """Render one story as a text card.

    The source link line only appears when the story has a ``sourceUrl``.

    :param story: Story to render.
    :return: Multi-line card text.
    """
    lines = [RULE]
    header = f"[{story.continent.upper()}]"
    if story.sourceUrl:
        header += f"  View Source: {story.sourceUrl}"
    lines.append(header)
    lines.append(story.title)
    lines.append("")
    lines.append(story.summary)
    lines.append("")
    lines.append(f"  IDEOLOGY  {story.ideology}")
    lines.append(f"  “{story.scripture.text}”")
    lines.append(f"  — {story.scripture.reference}")
    lines.append(f"  Perspective: {story.scripture.application}")
    return "\n".join(lines)
