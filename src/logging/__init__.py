"""Logging module."""
from .calculator_logger import CalculatorLogger

__all__ = ['CalculatorLogger']
