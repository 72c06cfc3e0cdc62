#!/usr/bin/env python3
"""
png2ico
Конвертация PNG в многоразмерную иконку Windows ICO.

Запуск: python main.py [--size 16,32,64,128,256] input.png output.ico
"""
import sys
import os

# Добавляем путь к src
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from png2ico.cli import main


if __name__ == "__main__":
    sys.exit(main())
