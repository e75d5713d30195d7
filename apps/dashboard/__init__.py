"""
Dashboard App - Operator admin API

Password login issuing short-lived session tokens, system statistics,
group overview/observation/deletion, the contact inbox and manual
retention cleanup.
"""
