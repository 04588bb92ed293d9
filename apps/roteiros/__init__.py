# apps/roteiros/__init__.py

"""
Roteiros - Texto do roteiro, planilha de planos e versões publicadas

A correlação liga um trecho do roteiro a um número de plano da planilha.
"""
