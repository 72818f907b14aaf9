import flet as ft

from common import messages, utils
from common.constants import SUCCESS
from fast_typing.controllers.countdown import Countdown
from fast_typing.controllers.round_controller import RoundController, RoundResult
from fast_typing.models.game_state import GameState
from fast_typing.models.phrase_source import PhraseSource

logger = utils.setup_logger("GameView")


class TypingGameApp:
    """Renders the round controller and forwards player actions to it."""

    def __init__(self, page: ft.Page):
        self.page = page
        self.page.title = messages.WINDOW_TITLE
        self.page.theme_mode = ft.ThemeMode.DARK
        self.page.window.width = 700
        self.page.window.height = 500
        self.page.padding = 20

        # Ticks are scheduled on flet's event loop, handlers below are async so
        # both run in the same context
        self.controller = RoundController(
            GameState(),
            PhraseSource(),
            Countdown(runner=self.page.run_task)
        )
        self.controller.on_round_started = self._on_round_started
        self.controller.on_tick = self._on_tick
        self.controller.on_resolved = self._on_resolved

        self._build_ui()
        self.controller.start_round()

    def _build_ui(self):
        self.lbl_word = ft.Text(
            "",
            size=28,
            weight=ft.FontWeight.BOLD,
            text_align=ft.TextAlign.CENTER,
            color=ft.Colors.BLUE_200,
        )
        self.lbl_level = ft.Text("", size=16)
        self.lbl_streak = ft.Text("", size=14, color=ft.Colors.GREY_400)
        self.lbl_timer = ft.Text("", size=22, weight=ft.FontWeight.BOLD)
        self.progress = ft.ProgressBar(value=1.0, expand=True)
        self.lbl_message = ft.Text("", size=14)

        self.txt_input = ft.TextField(
            label=messages.INPUT_LABEL,
            autofocus=True,
            expand=True,
            on_change=self.on_input_change,
            on_submit=self.on_validate,
        )
        self.btn_validate = ft.FilledButton(messages.VALIDATE_BUTTON, on_click=self.on_validate)
        self.btn_restart = ft.OutlinedButton(
            messages.RESTART_BUTTON,
            icon=ft.Icons.REFRESH,
            on_click=self.on_restart,
        )

        self.page.add(
            ft.Column(
                [
                    ft.Row([self.lbl_level, self.lbl_streak], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
                    ft.Divider(),
                    # Long phrases wrap inside the container width
                    ft.Container(
                        content=self.lbl_word,
                        alignment=ft.Alignment(0, 0),
                        padding=20,
                    ),
                    ft.Row([self.lbl_timer, self.progress]),
                    ft.Container(height=10),
                    ft.Row([self.txt_input, self.btn_validate]),
                    self.lbl_message,
                    ft.Container(height=10),
                    ft.Row([self.btn_restart], alignment=ft.MainAxisAlignment.END),
                ],
                expand=True,
            )
        )

    # --- Player actions ---

    async def on_input_change(self, e):
        self.controller.stage_input(self.txt_input.value)

    async def on_validate(self, e):
        self.controller.submit(self.txt_input.value)

    async def on_restart(self, e):
        self.controller.restart()

    # --- Controller callbacks ---

    def _on_round_started(self, controller: RoundController):
        self.txt_input.value = ""
        self.txt_input.disabled = False
        self.lbl_word.value = controller.phrase
        self.lbl_level.value = messages.LEVEL_LABEL.format(level=controller.game.current_level())
        self.lbl_streak.value = messages.STREAK_LABEL.format(streak=controller.game.consecutive_correct)
        self._render_feedback(controller)
        self._render_timer(controller)
        self.page.update()

    def _on_tick(self, controller: RoundController):
        self._render_timer(controller)
        self.page.update()

    def _on_resolved(self, controller: RoundController, result: RoundResult):
        # The next round is rendered by _on_round_started right after
        logger.debug(f"Resolved '{result.phrase}' with '{result.attempt}'")

    def _render_timer(self, controller: RoundController):
        self.lbl_timer.value = str(controller.remaining)
        self.progress.value = controller.progress()

    def _render_feedback(self, controller: RoundController):
        feedback = controller.feedback
        if feedback is None:
            self.lbl_message.value = ""
            return
        self.lbl_message.value = feedback.message
        self.lbl_message.weight = ft.FontWeight.BOLD
        self.lbl_message.color = ft.Colors.GREEN if feedback.kind == SUCCESS else ft.Colors.RED
