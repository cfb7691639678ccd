"""
Imobras - Gestão de contratos de locação, receitas e despesas
"""
__version__ = "1.0.0"
