"""
Audio playback - background music and one-shot effects via pygame.mixer
"""

import os

import pygame


class AudioManager:
    """
    Fire-and-forget audio; failures are reported and skipped
    """
    def __init__(self, enabled=True):
        self.enabled = enabled
        self._sounds = {}
        self._initialized = False

    def _ensure_mixer(self):
        """Initialize the mixer on first use"""
        if not self.enabled:
            return False
        if self._initialized:
            return True

        try:
            pygame.mixer.init()
        except pygame.error as e:
            print(f"Audio disabled: {e}")
            self.enabled = False
            return False

        self._initialized = True
        return True

    def play_music(self, path, loop=True):
        """
        Stream background music

        Args:
            path: Audio file path
            loop: Repeat until stopped
        """
        if not self._ensure_mixer():
            return False
        if not os.path.isfile(path):
            print(f"Music file not found: {path}")
            return False

        try:
            pygame.mixer.music.load(path)
            pygame.mixer.music.play(-1 if loop else 0)
        except pygame.error as e:
            print(f"Music playback failed: {e}")
            return False
        return True

    def play_effect(self, path):
        """Play a one-shot sound effect"""
        if not self._ensure_mixer():
            return False

        sound = self._sounds.get(path)
        if sound is None:
            if not os.path.isfile(path):
                print(f"Sound file not found: {path}")
                return False
            try:
                sound = pygame.mixer.Sound(path)
            except pygame.error as e:
                print(f"Sound load failed: {e}")
                return False
            self._sounds[path] = sound

        sound.play()
        return True

    def stop(self):
        if self._initialized:
            pygame.mixer.music.stop()
