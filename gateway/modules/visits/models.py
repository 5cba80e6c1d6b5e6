# Supabase table: site_visits
# Append-only visit log; rows are only ever counted, never updated.

"""
Expected Supabase table structure:

site_visits:
- id: uuid (primary key)
- user_id: uuid (nullable, references auth.users.id) - null for anonymous visits
- page_path: text (not null)
- visited_at: timestamptz (default: now())
"""
