"""Factory Operations back-office package.

Organized by feature modules (employees, attendance, production, materials, tools)
on top of one generic resource layer (records) with a thin Flask controller layer.
"""
