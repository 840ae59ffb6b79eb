"""
Core Domain Layer - O Hexágono.

Este pacote contém a lógica de negócio pura do catálogo, sem dependências
de frameworks.
Características:
- Zero dependências externas (ORM, web framework, etc.)
- 100% testável sem banco de dados
- Agnóstico a infraestrutura
"""
