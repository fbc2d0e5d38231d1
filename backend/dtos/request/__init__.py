"""
Request DTOs

Validated input for the use-case services: user creation and update,
registration, and packing list creation.
"""
