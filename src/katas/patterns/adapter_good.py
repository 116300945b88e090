"""Adapter - corrected.

Two incompatible players (:class:`Mp3Player.play_mp3` and
:class:`WavPlayer.play_wav_file`) are wrapped by adapters that both satisfy
:class:`AudioPlayer`. :class:`MediaPlayer` routes by file suffix and never
touches the wrapped APIs directly.
"""

from __future__ import annotations

import logging
from pathlib import PurePath
from typing import Protocol, runtime_checkable

from ..domain.domain_type import AudioFormat

logger = logging.getLogger(__name__)

DEFAULT_VOLUME = 100


# ---------------------------------------------------------------------------
# Incompatible third-party players
# ---------------------------------------------------------------------------


class Mp3Player:
    def play_mp3(self, filename: str) -> str:
        return f"Reproduciendo MP3: {filename}"


class WavPlayer:
    def play_wav_file(self, path: str, volume: int) -> str:
        return f"Reproduciendo archivo WAV: {path}"


# ---------------------------------------------------------------------------
# Common interface and adapters
# ---------------------------------------------------------------------------


@runtime_checkable
class AudioPlayer(Protocol):
    def play(self, filename: str) -> str: ...


class MP3Adapter:
    def __init__(self, player: Mp3Player | None = None) -> None:
        self._player = player or Mp3Player()

    def play(self, filename: str) -> str:
        return self._player.play_mp3(filename)


class WAVAdapter:
    def __init__(self, player: WavPlayer | None = None, volume: int = DEFAULT_VOLUME) -> None:
        self._player = player or WavPlayer()
        self._volume = volume

    def play(self, filename: str) -> str:
        return self._player.play_wav_file(filename, self._volume)


class MediaPlayer:
    def __init__(self) -> None:
        self._adapters: dict[str, AudioPlayer] = {
            AudioFormat.MP3: MP3Adapter(),
            AudioFormat.WAV: WAVAdapter(),
        }

    def register_adapter(self, extension: str, adapter: AudioPlayer) -> None:
        self._adapters[extension.lstrip(".").lower()] = adapter

    def supported_formats(self) -> tuple[str, ...]:
        return tuple(str(ext) for ext in self._adapters)

    def play_audio(self, filename: str) -> str:
        """Play ``filename`` through the adapter registered for its suffix.

        The extension is whatever follows the last dot of the file name, so a
        bare ``.mp3`` still routes to the MP3 adapter. Unsupported or missing
        extensions produce a failure string instead of raising.
        """
        name = PurePath(filename).name
        extension = name.rpartition(".")[2].lower() if "." in name else ""
        adapter = self._adapters.get(extension)
        if adapter is None:
            logger.debug("No adapter for %r", filename)
            return f"Tipo de archivo no soportado: {extension or filename}"
        return adapter.play(filename)


__all__ = ["AudioPlayer", "MP3Adapter", "MediaPlayer", "Mp3Player", "WAVAdapter", "WavPlayer"]
