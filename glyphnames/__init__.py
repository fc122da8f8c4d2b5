from glyphnames.display_names import DisplayNameDecomposer, decompose

__all__ = ["DisplayNameDecomposer", "decompose"]
