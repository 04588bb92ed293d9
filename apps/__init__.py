# apps/__init__.py

"""
Claquete - Aplicações Django

Este pacote contém todas as aplicações do sistema:
- core: Usuários, projetos, permissões e erros da API
- board: Quadro Kanban (colunas, cartões, anexos)
- chat: Canais, mensagens e relay WebSocket
- arquivos: Pastas e arquivos do projeto
- roteiros: Roteiro, correlação com planos e versões publicadas
- agenda: Calendário de gravações e publicações
- youtube: Metadados dos vídeos
"""

__version__ = '1.0.0'
