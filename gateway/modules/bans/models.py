# Supabase table: user_bans
# Append-only ban log. Bans are lifted by clearing is_active, never deleted.
# profiles.is_banned mirrors "has an active ban" and is written by the gateway.

"""
Expected Supabase table structure:

user_bans:
- id: uuid (primary key)
- user_id: uuid (not null, references auth.users.id)
- banned_by: uuid (nullable, references auth.users.id) - issuing admin
- reason: text (nullable)
- ban_type: text (not null) - 'temporary' | 'permanent'
- ban_until: timestamptz (nullable) - set only for temporary bans
- is_active: boolean (default: true)
- created_at: timestamp (default: now())

RPC get_user_ban_status() returns the active ban of the calling user, if any.
"""
