"""Adapter - anti-pattern.

The media player knows both third-party APIs by name and branches on the file
extension to call the right one. A third format means another branch here.
"""


class Mp3Player:
    def play_mp3(self, filename):
        return f"Reproduciendo MP3: {filename}"


class WavPlayer:
    def play_wav_file(self, path, volume=100):
        return f"Reproduciendo archivo WAV: {path}"


class MediaPlayer:
    def __init__(self):
        self.mp3 = Mp3Player()
        self.wav = WavPlayer()

    def play_audio(self, filename):
        ext = filename.split(".")[-1]
        if ext == "mp3":
            return self.mp3.play_mp3(filename)
        elif ext == "wav":
            return self.wav.play_wav_file(filename, 100)
        else:
            return "Tipo de archivo no soportado: " + ext
