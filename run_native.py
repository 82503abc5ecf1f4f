# run_native.py — launcher da demo (janela nativa)
from __future__ import annotations
import logging
import os
import flet as ft

from main import main as app_main

def log(msg: str):
    print(f"[BOOT] {msg}", flush=True)

if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("VIGOEDIT_LOG_LEVEL", "INFO"))
    log(f"Starting VigoEdit demo | CWD={os.getcwd()}")
    # Observação:
    # - AppView.FLET_APP abre janela nativa (desktop)
    # - Se preferir abrir no navegador, troque por AppView.WEB_BROWSER
    ft.app(target=app_main, view=ft.AppView.FLET_APP)
