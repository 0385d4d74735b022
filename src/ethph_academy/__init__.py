"""ETHPH Academy.

Learning site for Solidity and smart contract development, with a
simulated in-browser playground.
"""
