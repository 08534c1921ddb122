"""Custody domain modules: guardians, wallets, limits, transactions, emergency, audit."""
