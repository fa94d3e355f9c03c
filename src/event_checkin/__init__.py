"""Event Check-in package.

Organized by feature modules (registrations, attendance, tokens, export)
with a thin Flask controller layer over service/repository layers.
"""
