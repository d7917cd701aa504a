"""
auth — User authentication module.

Provides:
  • Signed token creation & verification
  • Password hashing (bcrypt, configurable work factor)
  • Signup / Login API routes
  • ``get_current_user_id`` FastAPI dependency
"""
