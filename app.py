from core import UIRoot
from elements import Alignment
from widgets import Button, CheckBox, Text, TextField


# ─── Bootstrapper ───────────────────────────────────────────────────────────

def main() -> None:

    # engine
    rt = UIRoot(480, 260, 60, 'widgets')
    state = {'name': '', 'subscribe': False}

    def on_name(text: str) -> None:
        state['name'] = text

    def on_subscribe(checked: bool) -> None:
        state['subscribe'] = checked

    def on_submit() -> None:
        print(f"[app] submit name={state['name']!r} subscribe={state['subscribe']}")

    def on_title() -> None:
        title.set_text('Sign up!')

    # widgets
    title = rt.add(Text(rt.surface, 240, 20, 'Sign up', on_title,
                        {'font_size': 28, 'text_align': Alignment.CENTER}))
    rt.add(Text(rt.surface, 40, 80, 'Name', lambda: None))
    rt.add(TextField(rt.surface, 140, 72, on_name, {'width': 220}, scheduler=rt.scheduler))
    rt.add(CheckBox(rt.surface, 140, 130, on_subscribe))
    rt.add(Text(rt.surface, 170, 130, 'Subscribe', lambda: None))
    rt.add(Button(rt.surface, 140, 180, 'Submit', on_submit))

    # commit

    rt.run()


if __name__ == "__main__":
    main()
