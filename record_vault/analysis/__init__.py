# ==============================================
# ANALYSIS (Vault statistics)
# ==============================================
#
# Modules:
# --------
# - vault_statistics.py  → VaultStatistics + compute_statistics()
#
# ==============================================

from .vault_statistics import VaultStatistics, compute_statistics

__all__ = ["VaultStatistics", "compute_statistics"]
