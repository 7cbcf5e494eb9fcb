"""Agenda: geração de datas recorrentes e validação de intervalos.

Subpastas:
- domain/: contratos (regras de repetição, resultados, eventos)
- services/: validador, gerador, planner e expansão de séries
- bootstrap/: inicialização do processo (settings base e logging)

Padrão: domain descreve; services calculam; config apoia.
"""
