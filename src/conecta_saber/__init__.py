"""Conecta Saber: core do cliente de agendamento de aulas de reforço."""

__version__ = "0.1.0"
