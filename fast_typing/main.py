import flet as ft
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fast_typing.views.game_view import TypingGameApp


def main(page: ft.Page):
    TypingGameApp(page)


def run():
    ft.run(main)


if __name__ == "__main__":
    run()
