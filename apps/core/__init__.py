# apps/core/__init__.py

"""
Core - Aplicação principal do Claquete

Contém:
- Models (User, Project, ProjectMember, Column, Content, Attachment)
- Principal, permissões por papel e middleware de erros JSON
- Access layer de usuários/projetos e API de auth/usuários/projetos
- Comando de seed para desenvolvimento
"""
