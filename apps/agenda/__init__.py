# apps/agenda/__init__.py

"""
Agenda - Calendário de gravações e publicações do projeto
"""
