import gradio as gr
from functools import partial

from object_dumper.config import DumperSettings
from object_dumper.handlers import (
    dump_json_handler,
    load_json_handler,
    refresh_depth_slider,
    run_all_samples_handler,
    run_sample_handler,
    sample_choices,
    select_sample_handler,
)
from object_dumper.log import configure_logging
from object_dumper.samples import QuerySamples

configure_logging(verbosity=1)

settings = DumperSettings.from_env()
harness = QuerySamples(settings)

# --- UI Definition ---
with gr.Blocks(title=harness.title) as demo:
    gr.Markdown(f"# {harness.title}")
    gr.Markdown("Pick a sample to see its code, run it, and read what the object dumper prints.")

    # State
    json_data_state = gr.State()

    with gr.Tab("Samples"):
        with gr.Row():
            # Left Panel: Sample list & code
            with gr.Column(scale=1):
                gr.Markdown("### 1. Choose a sample")
                sample_selector = gr.Dropdown(
                    label="Sample",
                    choices=sample_choices(harness),
                    value=None,
                    interactive=True,
                )
                sample_info = gr.Markdown()
                sample_code = gr.Code(label="Code", language="python", interactive=False)

            # Right Panel: Output
            with gr.Column(scale=1):
                gr.Markdown("### 2. Run")
                with gr.Row():
                    run_btn = gr.Button("Run", variant="primary")
                    run_all_btn = gr.Button("Run all")
                status_msg = gr.Textbox(label="Status", interactive=False)
                sample_output = gr.Textbox(label="Output", lines=20, interactive=False)

        sample_selector.change(
            fn=partial(select_sample_handler, harness=harness),
            inputs=[sample_selector],
            outputs=[sample_info, sample_code, sample_output],
        )

        run_btn.click(
            fn=partial(run_sample_handler, harness=harness),
            inputs=[sample_selector],
            outputs=[sample_output, status_msg],
        )

        run_all_btn.click(
            fn=partial(run_all_samples_handler, harness),
            inputs=[],
            outputs=[status_msg],
        )

    with gr.Tab("Dump JSON"):
        with gr.Row():
            with gr.Column(scale=1):
                gr.Markdown("### 1. Import")
                file_input = gr.File(label="Upload JSON File", file_types=[".json"])
                load_status = gr.Textbox(label="Status", interactive=False)

                gr.Markdown("### 2. Depth")
                depth_slider = gr.Slider(
                    label="Depth ceiling",
                    minimum=0,
                    maximum=10,
                    step=1,
                    value=settings.default_depth,
                )
                dump_btn = gr.Button("Dump", variant="primary")

            with gr.Column(scale=1):
                gr.Markdown("### 3. Output")
                dump_output = gr.Textbox(label="Dump", lines=24, interactive=False)

        file_input.upload(
            fn=load_json_handler,
            inputs=[file_input],
            outputs=[json_data_state, load_status],
        )

        dump_btn.click(
            fn=partial(dump_json_handler, settings=settings),
            inputs=[json_data_state, depth_slider],
            outputs=[dump_output, load_status],
        )

    demo.load(fn=partial(refresh_depth_slider, settings), inputs=[], outputs=[depth_slider])

if __name__ == "__main__":
    demo.launch()
