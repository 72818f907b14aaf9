# Player facing strings.

WINDOW_TITLE = "Escritura Rápida"

CORRECT = "¡Correcto! Nivel superado."
CORRECT_AT_TIMEOUT = "¡Correcto en el último segundo! Nivel superado."
INCORRECT = "Incorrecto. Mantienes el mismo nivel, inténtalo de nuevo."
TIMEOUT = "Tiempo agotado. Mantienes el mismo nivel."

LEVEL_LABEL = "Nivel: {level}"
STREAK_LABEL = "Racha: {streak}"
INPUT_LABEL = "Escribe aquí"
VALIDATE_BUTTON = "Validar"
RESTART_BUTTON = "Reiniciar"
