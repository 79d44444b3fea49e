# englishnorm/api/__init__.py
# ============================
# API Layer — EnglishNorm
#
#   POST /api/v1/ensure-english   {"text": "..."} → normalized English + metadata
