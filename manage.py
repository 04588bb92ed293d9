#!/usr/bin/env python
"""
Django's command-line utility for administrative tasks.

Claquete - Produção de mídia em quadros Kanban
"""

import os
import sys


def main():
    """Run administrative tasks."""

    # Suíte de testes usa settings próprios (SQLite em memória)
    if len(sys.argv) > 1 and sys.argv[1] == 'test':
        os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.test')

    # Configuração padrão para desenvolvimento
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.development')

    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    # Comandos customizados do Claquete
    if len(sys.argv) > 1:
        command = sys.argv[1]

        # Comando de setup inicial
        if command == 'setup':
            print("🎬 Configurando Claquete...")

            # Executar migrações
            print("📊 Aplicando migrações...")
            if os.system(f'{sys.executable} manage.py migrate') != 0:
                print("❌ Erro nas migrações")
                return

            # Coletar arquivos estáticos
            print("📁 Coletando arquivos estáticos...")
            os.system(f'{sys.executable} manage.py collectstatic --noinput')

            # Dados de demonstração
            print("🌱 Populando banco com dados demo...")
            if os.system(f'{sys.executable} manage.py seed') == 0:
                print("✅ Setup concluído!")
                print("🔑 Acesse com: johndoe/password123")
            else:
                print("⚠️  Setup parcial concluído (sem dados demo)")
            return

        elif command == 'backup':
            print("💾 Criando backup do banco...")
            from datetime import datetime
            timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
            backup_file = f"backup_claquete_{timestamp}.json"
            os.system(
                f'{sys.executable} manage.py dumpdata --indent 2 '
                f'--exclude contenttypes --exclude auth.permission > {backup_file}'
            )
            print(f"✅ Backup criado: {backup_file}")
            return

    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
