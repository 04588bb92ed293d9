# apps/youtube/__init__.py

"""
YouTube - Metadados dos vídeos planejados para publicação
"""
