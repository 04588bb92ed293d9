# apps/board/__init__.py

"""
Board - Quadro Kanban do Claquete

Access layer e API JSON de colunas, cartões (com reordenação por
drag-and-drop) e anexos. Os models ficam em apps.core.
"""
