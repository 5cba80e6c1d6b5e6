# Supabase table: profiles
# One row per auth.users entry, created by a trigger on sign up.

"""
Expected Supabase table structure:

profiles:
- id: uuid (primary key, references auth.users.id)
- full_name: text (nullable) - copied from sign up metadata
- avatar_url: text (nullable) - public URL in the profile-avatars bucket
- role: text (default: 'user') - 'user' | 'admin'
- is_banned: boolean (default: false) - denormalized from user_bans
- created_at: timestamp (default: now())

RPC get_user_profile(user_id uuid) returns the row for user_id.
"""
