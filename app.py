from schema_annotator.settings import get_settings
from schema_annotator.ui import build_demo

# --- UI Definition ---
demo = build_demo()

if __name__ == "__main__":
    settings = get_settings()
    demo.launch(server_name=settings.server_name, server_port=settings.server_port)
