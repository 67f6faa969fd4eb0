"""Code Learning Assistant: browser UI with one tab per view."""

import logging
from functools import partial
from typing import Optional

import gradio as gr

from api.config import CONTENT_PATH, DISABLE_GRADIO_SHARE, LOG_LEVEL
from src.content import ContentStore, load_content
from src.session import SessionState
from ui.constants import APP_TITLE, FOOTER_TEXT, VIEW_TITLES
from views import dashboard, editor, exercises, tutorials

logger = logging.getLogger("app")

MODULES = [
    ("editor", editor.render),
    ("exercises", exercises.render),
    ("tutorials", tutorials.render),
    ("dashboard", dashboard.render),
]


def build_demo(store: Optional[ContentStore] = None) -> gr.Blocks:
    """Create the Gradio app with one tab per view."""
    store = store or load_content(CONTENT_PATH)
    components = {}
    with gr.Blocks(title=APP_TITLE) as demo:
        gr.Markdown(f"# {APP_TITLE}")
        state = gr.State(SessionState())
        with gr.Tabs(selected="editor") as tabs:
            for view_id, render in MODULES:
                with gr.Tab(VIEW_TITLES[view_id], id=view_id) as tab:
                    components[view_id] = render(tab, state, store)
        gr.Markdown(FOOTER_TEXT)

        code = components["editor"]["code"]
        banner = components["editor"]["banner"]
        start = partial(exercises.start_exercise, store=store)
        for view_id in ("exercises", "dashboard"):
            components[view_id]["start"].click(
                start,
                inputs=[components[view_id]["picker"], state],
                outputs=[state, tabs, code, banner],
            )
        components["tutorials"]["try_in_editor"].click(
            partial(tutorials.try_in_editor, store=store),
            inputs=state,
            outputs=[state, tabs],
        )
    return demo


demo = build_demo()

if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL)
    logger.info("Starting %s", APP_TITLE)
    if DISABLE_GRADIO_SHARE:
        demo.launch()
    else:
        demo.launch(share=True)
