"""
Services Layer

Operations behind the routes:
- Accept a session, an explicit CallerContext and plain keyword inputs
- Check identity first, then ownership, then touch the store once
- Return model instances; routes wrap them in response envelopes
- Raise MemeApiError subclasses, never HTTPException
"""
