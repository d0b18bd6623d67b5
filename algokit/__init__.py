"""Classic algorithms: arrays, number theory, sorting, searching, graphs, trees and problems."""

__version__ = "0.1.0"
__all__ = ["arrays", "numtheory", "sorting", "searching", "graphs", "problems", "trees"]