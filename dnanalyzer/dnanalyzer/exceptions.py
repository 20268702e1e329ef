class DNAnalyzerError(Exception):
    """Base exception for dnanalyzer"""
    pass


class InvalidArgumentError(DNAnalyzerError):
    """Raised for out-of-range frames, inverted count ranges and similar"""
    pass


class AminoAcidNotFoundError(InvalidArgumentError):
    """Raised when an amino acid name cannot be resolved against the codon table"""
    pass


class EmptyInputError(DNAnalyzerError):
    """Raised when a report needs at least one protein and got none"""
    pass


class InputFormatError(DNAnalyzerError):
    """Raised for unreadable, empty or non-DNA input"""
    pass
