"""
Core do LSC config.

Subpacotes:
    - config        → parse, merge, projeções e persistência da configuração
    - logging_setup → loggers e handlers da biblioteca
"""
