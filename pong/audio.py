"""Sound effects played on collisions and scoring."""

from pathlib import Path

import pygame

SAMPLE_RATE = 44100
SOUND_NAMES = ("wall", "paddle", "score")


class Sound:
    """A sound effect that is not restarted while it is still playing."""

    def __init__(self, player):
        self.player = player

    @property
    def is_playing(self) -> bool:
        return self.player.get_num_channels() > 0

    def play(self) -> None:
        """Start the sound from the beginning unless it is already playing."""
        if not self.is_playing:
            self.player.stop()
            self.player.play()


def load_sounds(directory) -> dict[str, Sound]:
    """Load the wall, paddle and score effects from Ogg files in directory."""
    base = Path(directory)
    paths = {name: base / f"{name}.ogg" for name in SOUND_NAMES}
    for path in paths.values():
        if not path.is_file():
            raise FileNotFoundError(f"sound file not found: {path}")
    if pygame.mixer.get_init() is None:
        pygame.mixer.init(frequency=SAMPLE_RATE)
    return {name: Sound(pygame.mixer.Sound(str(path))) for name, path in paths.items()}