"""RU: Стадии подготовки HLS-лестницы.

Каждая стадия: небольшой модуль с чистыми функциями сборки команд и одной
функцией, которая вызывает внешний инструмент.

EN: Stages of HLS ladder preparation.

Each stage is a small module with pure command builders and a single function
that calls out to the external tool.
"""
