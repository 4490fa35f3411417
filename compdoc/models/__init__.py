"""
Data models for compdoc: parser options and documentation records.
"""
