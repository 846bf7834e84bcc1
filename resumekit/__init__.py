"""
resumekit - resume text extraction, validation and layout engine
"""
__version__ = "1.0.0"
