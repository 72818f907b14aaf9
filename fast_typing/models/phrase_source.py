import random
from typing import Iterable, Optional, Tuple

DEFAULT_CATALOG: Tuple[str, ...] = (
    # --- Everyday sentences ---
    "El perro corre rápido",
    "Hoy hace mucho calor en Cali",
    "Me gusta el chocolate con pan",
    "Estudiar en la noche es complicado",
    "La lluvia cae fuerte en septiembre",
    "El café colombiano es el mejor",
    "Las estrellas brillan en el cielo nocturno",
    "No estaba muerto andaba de parranda",
    "Me dio pereza levantarme de la cama",
    "Se armó la gorda en la fiesta",
    "Me salió más caro el caldo que los huevos",

    # --- Proverbs ---
    "Más vale tarde que nunca",
    "Camarón que se duerme se lo lleva la corriente",
    "El que madruga Dios lo ayuda",
    "A caballo regalado no se le mira el diente",
    "Al mal tiempo buena cara",
    "Ojos que no ven corazón que no siente",
    "Cría cuervos y te sacarán los ojos",

    # --- Pop culture ---
    "Que la fuerza te acompañe",
    "No me quiero ir señor Stark",
    "Hakuna Matata",
    "Hasta el infinito y más allá",
    "Winter is coming",
    "May the Force be with you",
    "I'll be back",
    "I am inevitable",
    "Wubba Lubba Dub Dub!",
    "Bazinga!",
    "All your base are belong to us",
    "Praise the Sun \\[T]/",
    "It's dangerous to go alone!",
    "Fus Ro Dah!",
    "¡Hadouken!",
    "Among Us sus",
    "Doge: wow, much code, very fast",
    "One does not simply walk into Mordor",
    "Shrek es amor, Shrek es vida.",

    # --- Tongue twisters and pangrams ---
    "Tres tristes tigres tragaban trigo en un trigal",
    "El veloz murciélago hindú comía feliz cardillo y kiwi",
    "La cigüeña tocaba el saxofón detrás del palenque de paja",
    "Quiere la boca exhausta vid, kiwi, piña y fugaz jamón",
    "Pablito clavó un clavito en la calva de un calvito",
    "Sphinx of black quartz, judge my vow",
    "The quick brown fox jumps over the lazy dog",

    # --- Long sentences ---
    "En una pequeña aldea todos se conocían y compartían historias",
    "La biblioteca estaba llena de libros antiguos y aroma a papel viejo",
    "El trayecto hacia la cumbre fue duro pero la vista valió la pena",
    "Caminó bajo la lluvia sin prisa, pensando en el futuro incierto",
)


class PhraseSource:
    """Fixed catalog of phrases, drawn uniformly at random with replacement."""

    def __init__(self, catalog: Iterable[str] = DEFAULT_CATALOG, rng: Optional[random.Random] = None):
        self._catalog: Tuple[str, ...] = tuple(catalog)
        if not self._catalog:
            raise ValueError("Phrase catalog must not be empty")
        self._rng = rng or random.Random()

    @property
    def catalog(self) -> Tuple[str, ...]:
        return self._catalog

    def __len__(self) -> int:
        return len(self._catalog)

    def random_phrase(self) -> str:
        return self._rng.choice(self._catalog)
