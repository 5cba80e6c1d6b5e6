# Supabase table: categories

"""
Expected Supabase table structure:

categories:
- id: uuid (primary key)
- name: text (not null)
- slug: text (unique, not null)
- icon: text (nullable) - icon name or emoji shown next to the category
- description: text (nullable)
- created_at: timestamp (default: now())
"""
