"""RU: Генератор HLS-лестницы (1080p/720p/480p) поверх ffprobe и FFmpeg.

EN: HLS rendition ladder (1080p/720p/480p) built on top of ffprobe and FFmpeg.
"""

__version__ = "0.1.0"
