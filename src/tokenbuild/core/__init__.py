"""Core token pipeline: loading, transforms, filters, formats, builds."""
