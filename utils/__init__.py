"""
Shared helpers: exceptions, handler decorators and ARN formatting.
"""
