import gradio as gr

from valuation_splitter.config import get_config
from valuation_splitter.handlers import load_records_handler, split_records_handler

# --- UI Definition ---
with gr.Blocks(title="Valuation Splitter") as demo:
    gr.Markdown("# Valuation Splitter")
    gr.Markdown("Upload a valuation export, tick the properties to exclude, and download both halves.")

    # State
    records_state = gr.State()

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            file_input = gr.File(label="Upload JSON File", file_types=[".json"], type="filepath")
            status_msg = gr.Textbox(label="Status", interactive=False)
            record_count = gr.Textbox(label="Record Count", interactive=False)

        # Right Panel: Selection & Export
        with gr.Column(scale=2):
            gr.Markdown("### 2. Select Properties to Exclude")
            excluded_boxes = gr.CheckboxGroup(choices=[], value=[], label="Records", type="value")

            gr.Markdown("### 3. Split")
            split_btn = gr.Button("Split & Download", variant="primary")
            download_output = gr.File(label="Download Result", file_count="multiple")

    file_input.upload(
        fn=load_records_handler,
        inputs=[file_input],
        outputs=[records_state, excluded_boxes, status_msg, record_count],
    )

    split_btn.click(
        fn=split_records_handler,
        inputs=[records_state, excluded_boxes, file_input],
        outputs=[download_output, status_msg],
    )

if __name__ == "__main__":
    demo.launch(server_port=get_config().server_port)
