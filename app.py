import gradio as gr

from locale_table.config import configure_logging, get_settings
from locale_table.handlers import (
    get_locale,
    handle_locale_upload,
    set_locale,
    summarize_locales,
    translate,
)
from locale_table.lookup import Translator

settings = get_settings()
configure_logging(settings)
initial_translator = Translator.from_settings(settings)

# --- UI Definition ---
with gr.Blocks(title="Locale Table Browser") as demo:
    gr.Markdown("# Locale Table Browser")
    gr.Markdown("Upload YAML, JSON or TOML locale files, then browse the merged translations per locale.")

    # State
    translator_state = gr.State(value=initial_translator)

    with gr.Row():
        # Left Panel: Import
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            files_input = gr.File(
                label="Upload Locale Files",
                file_types=[".yml", ".yaml", ".json", ".toml"],
                file_count="multiple",
            )
            status_msg = gr.Textbox(label="Status", interactive=False)
            locale_overview = gr.Dataframe(
                headers=["Locale", "Keys"],
                datatype=["str", "number"],
                value=summarize_locales(initial_translator),
                interactive=False,
                label="Available Locales",
            )

        # Right Panel: Lookup
        with gr.Column(scale=1):
            gr.Markdown("### 2. Lookup")
            locale_selector = gr.Dropdown(
                label="Current Locale",
                choices=initial_translator.available_locales(),
                value=get_locale(initial_translator),
                allow_custom_value=True,
                interactive=True,
            )
            key_input = gr.Textbox(label="Translation Key", placeholder="welcome.title")
            translate_btn = gr.Button("Translate", variant="primary")
            translation_output = gr.Textbox(label="Translation", interactive=False)

    gr.Markdown("### 3. Translation Table")
    table_view = gr.JSON(label="Flattened translations", value=initial_translator.get_translations_data())

    files_input.upload(
        fn=handle_locale_upload,
        inputs=[files_input, locale_selector],
        outputs=[translator_state, status_msg, locale_selector, table_view],
    ).then(
        fn=summarize_locales,
        inputs=[translator_state],
        outputs=[locale_overview],
    )

    locale_selector.change(
        fn=set_locale,
        inputs=[translator_state, locale_selector, key_input],
        outputs=[status_msg, translation_output],
    )

    translate_btn.click(
        fn=translate,
        inputs=[translator_state, key_input],
        outputs=[translation_output],
    )

if __name__ == "__main__":
    demo.launch()
