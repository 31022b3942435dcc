# src/confmerge/core/__init__.py
"""
Core do confmerge.

Componentes principais:
    - config → merge, chaves compostas, carregamento de fontes e store
    - errors → payload canônico e catálogo de tipos de erro

Princípios fundamentais:
    - Nenhuma decisão silenciosa: todo comportamento é explícito e testado
    - Nenhum estado global: cada `Configuration` possui sua própria árvore
"""
