# apps/chat/__init__.py

"""
Chat - Canais, mensagens diretas e relay WebSocket

O relay (consumers.ChatConsumer) autentica o socket, entra em canais,
persiste mensagens e entrega para os membros conectados usando o
ConnectionRegistry injetado pelo routing.
"""
