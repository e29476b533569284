from functools import partial

import gradio as gr

from json_inspector.config import load_config
from json_inspector.handlers import (
    clear_handler,
    export_handler,
    load_file_handler,
    process_handler,
    sample_handler,
    summary_handler,
)
from json_inspector.logger_config import setup_logger

config = load_config()
setup_logger("json_inspector", config.log_level, config.log_file)

process = partial(process_handler, config=config)

# --- UI Definition ---
with gr.Blocks(title="JSON Inspector") as demo:
    gr.Markdown("# JSON Inspector")
    gr.Markdown("Validate, format, minify and analyze JSON documents.")

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Input")
            file_input = gr.File(label="Upload JSON File", file_types=[".json"])
            json_input = gr.Code(label="JSON Input", language="json", lines=20)
            with gr.Row():
                sample_btn = gr.Button("Load Sample")
                clear_btn = gr.Button("Clear")
            preview_box = gr.Textbox(label="File Preview", interactive=False, lines=6)
            summary = gr.JSON(label="Quick Stats")

        # Right Panel: Output
        with gr.Column(scale=1):
            gr.Markdown("### 2. Options")
            view_selector = gr.Radio(
                choices=["formatted", "minified", "stats"],
                value="formatted",
                label="View",
            )
            indent_size = gr.Dropdown(
                label="Indent Size",
                choices=[0, 2, 4, 8],
                value=config.indent_size,
                interactive=True,
            )
            sort_keys = gr.Checkbox(label="Sort Keys", value=False)
            process_btn = gr.Button("Process", variant="primary")
            status_msg = gr.Textbox(label="Status", interactive=False)

            gr.Markdown("### 3. Output")
            json_output = gr.Code(label="Output", language="json", lines=20, interactive=False)
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="output")
            export_btn = gr.Button("Download Output")
            download_output = gr.File(label="Download Result")

    process_inputs = [json_input, view_selector, indent_size, sort_keys]
    process_outputs = [json_output, status_msg]

    file_input.upload(
        fn=partial(load_file_handler, config=config),
        inputs=[file_input],
        outputs=[json_input, preview_box, status_msg],
    )

    sample_btn.click(fn=sample_handler, inputs=[], outputs=[json_input])

    clear_btn.click(
        fn=clear_handler,
        inputs=[],
        outputs=[json_input, json_output, status_msg, preview_box, summary],
    )

    json_input.change(fn=summary_handler, inputs=[json_input], outputs=[summary])

    process_btn.click(fn=process, inputs=process_inputs, outputs=process_outputs)
    view_selector.change(fn=process, inputs=process_inputs, outputs=process_outputs)
    indent_size.change(fn=process, inputs=process_inputs, outputs=process_outputs)
    sort_keys.change(fn=process, inputs=process_inputs, outputs=process_outputs)

    export_btn.click(
        fn=export_handler,
        inputs=[json_output, output_filename],
        outputs=[download_output, status_msg],
    )

if __name__ == "__main__":
    demo.launch()
