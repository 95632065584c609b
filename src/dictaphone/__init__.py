"""dictaphone: windowed transcript segmentation with TXT/SRT/VTT export."""

__version__ = '0.1.0'
