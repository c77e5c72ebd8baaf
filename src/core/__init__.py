"""
Core fraction arithmetic: value model, overflow-checked math, text forms.

Модули не зависят от внешних систем и не хранят разделяемого состояния.
"""
