from __future__ import annotations

from functools import partial
from typing import Optional

import gradio as gr

from .handlers import (
    enum_change_handler,
    format_change_handler,
    generate_fields_handler,
    load_file_handler,
    required_change_handler,
    type_change_handler,
)
from .kinds import NO_FORMAT, SCHEMA_TYPES
from .settings import Settings, get_settings

# Object fields get their type from the document, so leaf rows never offer it.
LEAF_TYPES = [t for t in SCHEMA_TYPES if t != "object"]


def build_demo(settings: Optional[Settings] = None) -> gr.Blocks:
    config = settings or get_settings()

    with gr.Blocks(title=config.app_title) as demo:
        gr.Markdown(f"# {config.app_title}")
        gr.Markdown("Paste a sample JSON payload, generate its fields, then annotate them to shape the schema.")

        # State
        session_state = gr.State()
        fields_state = gr.State()

        with gr.Row():
            # Left Panel: Input & Fields
            with gr.Column(scale=1):
                gr.Markdown("### 1. Input")
                file_input = gr.File(label="Upload JSON File", file_types=[".json"])
                json_input = gr.Textbox(label="JSON Payload", lines=12, placeholder='{"name": "Ada"}')
                generate_btn = gr.Button("Generate Fields", variant="primary")
                status_msg = gr.Textbox(label="Status", interactive=False)

                gr.Markdown("### 2. Annotate Fields")

                @gr.render(inputs=[fields_state], triggers=[fields_state.change])
                def render_fields(payload):
                    if not payload or not payload.get("rows"):
                        gr.Markdown("No fields generated.")
                        return

                    children = {}
                    for row in payload["rows"]:
                        children.setdefault(row["parent"], []).append(row)

                    def field_row(row):
                        path = row["path"]
                        with gr.Row():
                            cb = gr.Checkbox(label=row["key"], value=False, scale=1)
                            cb.change(
                                fn=partial(required_change_handler, path),
                                inputs=[cb, session_state],
                                outputs=[session_state, schema_output, status_msg],
                            )
                            if not row["editable"]:
                                return

                            type_select = gr.Dropdown(choices=LEAF_TYPES, value="string", label="type", scale=1)
                            format_select = gr.Dropdown(
                                choices=row["format_choices"], value=NO_FORMAT, label="format", scale=1
                            )
                            enum_input = gr.Textbox(label="enum", placeholder="enum", scale=2)

                            type_select.change(
                                fn=partial(type_change_handler, path),
                                inputs=[type_select, session_state],
                                outputs=[session_state, format_select, enum_input, schema_output, status_msg],
                            )
                            format_select.change(
                                fn=partial(format_change_handler, path),
                                inputs=[format_select, session_state],
                                outputs=[session_state, schema_output, status_msg],
                            )
                            enum_input.input(
                                fn=partial(enum_change_handler, path),
                                inputs=[enum_input, session_state],
                                outputs=[session_state, schema_output, status_msg],
                            )

                    def recursive_ui(parent):
                        for row in children.get(parent, []):
                            field_row(row)
                            if row["has_children"]:
                                with gr.Accordion(row["key"], open=False):
                                    recursive_ui(row["path"])

                    recursive_ui("")

            # Right Panel: Schema
            with gr.Column(scale=1):
                gr.Markdown("### 3. JSON Schema")
                schema_output = gr.Code(label="JSON Schema", language="json", interactive=False)

        file_input.upload(
            fn=load_file_handler,
            inputs=[file_input],
            outputs=[json_input, status_msg],
        )

        generate_btn.click(
            fn=generate_fields_handler,
            inputs=[json_input, session_state],
            outputs=[session_state, fields_state, schema_output, status_msg],
        )

    return demo
