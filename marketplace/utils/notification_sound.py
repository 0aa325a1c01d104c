"""Short two-tone chime played when a notification arrives.

Playback is best effort: if no audio player is installed, or it fails to
start, nothing happens and nothing is raised.
"""

import io
import logging
import math
import os
import shutil
import struct
import subprocess
import tempfile
import threading
import wave
from typing import Optional

logger = logging.getLogger("marketplace")

SAMPLE_RATE = 22050
DURATION_S = 0.3
SWITCH_AT_S = 0.1
LOW_HZ = 800
HIGH_HZ = 1000
PEAK_GAIN = 0.3
FLOOR_GAIN = 0.01
ATTACK_S = 0.01
PLAYER_TIMEOUT_S = 5

# Tried in order. Players that read stdin get the WAV piped in; the rest
# get a file path appended to the command.
PLAYERS = (
    (("afplay",), False),
    (("aplay", "-q", "-"), True),
    (("paplay",), True),
)


def _gain(t: float) -> float:
    if t < ATTACK_S:
        return PEAK_GAIN * t / ATTACK_S
    # exponential decay from peak to floor over the remaining time
    progress = (t - ATTACK_S) / (DURATION_S - ATTACK_S)
    return PEAK_GAIN * (FLOOR_GAIN / PEAK_GAIN) ** progress


def chime_wav() -> bytes:
    """Render the chime as 16-bit mono WAV bytes."""
    frames = bytearray()
    phase = 0.0
    for i in range(int(SAMPLE_RATE * DURATION_S)):
        t = i / SAMPLE_RATE
        freq = LOW_HZ if t < SWITCH_AT_S else HIGH_HZ
        phase += 2 * math.pi * freq / SAMPLE_RATE
        sample = int(32767 * _gain(t) * math.sin(phase))
        frames += struct.pack("<h", sample)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wav:
        wav.setnchannels(1)
        wav.setsampwidth(2)
        wav.setframerate(SAMPLE_RATE)
        wav.writeframes(bytes(frames))
    return buf.getvalue()


def find_player() -> Optional[tuple]:
    """First installed player as ``(argv, reads_stdin)``, or None."""
    for argv, reads_stdin in PLAYERS:
        if shutil.which(argv[0]):
            return argv, reads_stdin
    return None


def play_wav(argv: tuple, reads_stdin: bool, wav: bytes) -> None:
    """Run the player to completion. Failures are logged, never raised."""
    try:
        if reads_stdin:
            subprocess.run(
                list(argv), input=wav, timeout=PLAYER_TIMEOUT_S,
                stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL,
            )
            return
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "chime.wav")
            with open(path, "wb") as fh:
                fh.write(wav)
            subprocess.run(
                [*argv, path], timeout=PLAYER_TIMEOUT_S,
                stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL,
            )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("Could not play notification sound: %s", e)


def play_notification_sound() -> Optional[threading.Thread]:
    """Play the chime in the background through the first available player.

    Returns the playback thread, or None when no player is installed.
    """
    player = find_player()
    if player is None:
        logger.debug("No audio player available, skipping notification sound")
        return None
    argv, reads_stdin = player
    thread = threading.Thread(
        target=play_wav, args=(argv, reads_stdin, chime_wav()),
        name="notification-sound", daemon=True,
    )
    thread.start()
    return thread
