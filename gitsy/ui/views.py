"""Rich renderables for the render models."""

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from gitsy.constants import TONE_STYLES
from gitsy.ui.render import Body, InputView, ListView, SetupRenderModel, TextView, Tone


def style_for(tone: Tone) -> str:
    return TONE_STYLES[tone.value]


def render_title(title: str) -> Panel:
    return Panel(Text(title, style=TONE_STYLES["title"]))


def render_list(view: ListView) -> Panel:
    text = Text()
    for index, item in enumerate(view.items):
        if index:
            text.append("\n")
        tone = Tone.HIGHLIGHT if index == view.selected else Tone.NORMAL
        text.append(item, style=style_for(tone))
    return Panel(text, title=view.title, title_align="left")


def render_input(view: InputView) -> Panel:
    """Input field with the cursor drawn as a reverse-video cell."""
    input_style = style_for(Tone.INPUT)
    before = view.text[:view.cursor]
    under = view.text[view.cursor:view.cursor + 1] or " "
    after = view.text[view.cursor + 1:]

    text = Text(before, style=input_style)
    text.append(under, style=f"{input_style} reverse")
    text.append(after, style=input_style)
    return Panel(text, title=view.title, title_align="left")


def render_text(view: TextView) -> Panel:
    return Panel(Text(view.text, style=style_for(view.tone)), title=view.title, title_align="left")


def render_body(body: Body) -> RenderableType:
    if isinstance(body, ListView):
        return render_list(body)
    if isinstance(body, InputView):
        return render_input(body)
    return render_text(body)


def render_instructions(instructions: str) -> Text:
    return Text(instructions, style=style_for(Tone.MUTED))


def render_setup_info(model: SetupRenderModel) -> Group:
    repo_line = Text("Git Repository: ", style=TONE_STYLES["label"])
    repo_line.append(model.repo_root, style=style_for(Tone.NORMAL))
    return Group(repo_line, Text(""), Text(model.hint, style=style_for(Tone.MUTED)))
