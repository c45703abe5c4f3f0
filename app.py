import gradio as gr
from functools import partial

from json_schema_builder.config import AppConfig, configure_logging
from json_schema_builder.fields import FieldKind
from json_schema_builder.handlers import (
    add_field_handler,
    change_kind_handler,
    clear_fields_handler,
    field_component_key,
    remove_field_handler,
    rename_field_handler,
    summarize_fields,
)
from json_schema_builder.preview import preview_json

config = AppConfig.from_env()
configure_logging(config.log_level)

KIND_CHOICES = [kind.value for kind in FieldKind]

# Every listener that writes fields_state shares one queue slot, so edits apply one at a time.
FIELD_QUEUE = {"concurrency_id": "fields", "concurrency_limit": 1}

# --- UI Definition ---
with gr.Blocks(title="JSON Schema Builder") as demo:
    gr.Markdown("# JSON Schema Builder")
    gr.Markdown("Add fields, pick their types, nest them, and watch the JSON preview update.")

    # State: the current Forest snapshot (tuple of Field)
    fields_state = gr.State(value=())

    with gr.Row():
        # Left Panel: Field Editor
        with gr.Column(scale=1):
            gr.Markdown("### Fields")

            @gr.render(inputs=[fields_state], triggers=[fields_state.change])
            def render_fields(fields):
                if not fields:
                    gr.Markdown("No fields yet. Click **+ Add Field** to start.")
                    return

                outputs = [fields_state, preview_code, status_msg]

                def recursive_ui(siblings, path=()):
                    for i, field in enumerate(siblings):
                        cur = path + (i,)
                        with gr.Group():
                            with gr.Row():
                                name_box = gr.Textbox(
                                    value=field.name,
                                    placeholder="Field Name",
                                    show_label=False,
                                    scale=3,
                                    key=field_component_key("name", field.id),
                                )
                                kind_dropdown = gr.Dropdown(
                                    choices=KIND_CHOICES,
                                    value=field.kind.value,
                                    show_label=False,
                                    interactive=True,
                                    scale=1,
                                    key=field_component_key("kind", field.id),
                                )
                                remove_btn = gr.Button(
                                    "✕",
                                    variant="stop",
                                    scale=0,
                                    min_width=40,
                                    key=field_component_key("remove", field.id),
                                )

                            rename = partial(rename_field_handler, cur, indent=config.preview_indent)
                            name_box.blur(fn=rename, inputs=[name_box, fields_state], outputs=outputs, **FIELD_QUEUE)
                            name_box.submit(fn=rename, inputs=[name_box, fields_state], outputs=outputs, **FIELD_QUEUE)
                            kind_dropdown.input(
                                fn=partial(change_kind_handler, cur, indent=config.preview_indent),
                                inputs=[kind_dropdown, fields_state],
                                outputs=outputs,
                                **FIELD_QUEUE,
                            )
                            remove_btn.click(
                                fn=partial(remove_field_handler, cur, indent=config.preview_indent),
                                inputs=[fields_state],
                                outputs=outputs,
                                **FIELD_QUEUE,
                            )

                            if field.is_nested:
                                with gr.Accordion(field.name or "(unnamed)", open=True):
                                    recursive_ui(field.children, cur)
                                    add_nested_btn = gr.Button(
                                        "+ Add Nested",
                                        size="sm",
                                        key=field_component_key("add", field.id),
                                    )
                                    add_nested_btn.click(
                                        fn=partial(add_field_handler, cur, indent=config.preview_indent),
                                        inputs=[fields_state],
                                        outputs=outputs,
                                        **FIELD_QUEUE,
                                    )

                recursive_ui(fields)

            with gr.Row():
                add_btn = gr.Button("+ Add Field", variant="primary")
                clear_btn = gr.Button("Clear")

        # Right Panel: Preview
        with gr.Column(scale=1):
            gr.Markdown("### JSON Preview")
            preview_code = gr.Code(value=preview_json({}, indent=config.preview_indent), language="json", interactive=False)
            status_msg = gr.Textbox(label="Status", value=summarize_fields(()), interactive=False)

    add_btn.click(
        fn=partial(add_field_handler, (), indent=config.preview_indent),
        inputs=[fields_state],
        outputs=[fields_state, preview_code, status_msg],
        **FIELD_QUEUE,
    )

    clear_btn.click(
        fn=partial(clear_fields_handler, indent=config.preview_indent),
        inputs=[],
        outputs=[fields_state, preview_code, status_msg],
        **FIELD_QUEUE,
    )

if __name__ == "__main__":
    demo.launch(server_name=config.host, server_port=config.port, share=config.share)
