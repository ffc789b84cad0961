import logging
from ui.app_ui import build_app

def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    demo = build_app()
    demo.queue().launch()

if __name__ == "__main__":
    main()
