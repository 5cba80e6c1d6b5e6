# Supabase Auth
# Identities and sessions live in Supabase's auth.users table.
# The gateway never writes to it directly:
# - auth.sign_up() - register with email/password and full_name metadata
# - auth.sign_in_with_password() - open a session on the gateway's client
# - auth.get_user() - resolve the identity behind the current session
# - auth.sign_out() - drop the current session

"""
Ban state is not part of auth.users. After a successful sign in the
gateway asks the get_user_ban_status RPC (see modules/bans/models.py) and
signs the session back out when an active ban exists.
"""
