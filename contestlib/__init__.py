"""Algorithms and helpers for competitive programming: calendars, hashing, palindromes, FFT/NTT, stress testing and debug output."""

__version__ = "0.1.0"