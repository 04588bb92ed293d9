# apps/arquivos/__init__.py

"""
Arquivos - Pastas e metadados de arquivos dos projetos
"""
