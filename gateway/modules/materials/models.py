# Supabase table: materials
# Study materials shared as a Telegram link, grouped by category.

"""
Expected Supabase table structure:

materials:
- id: uuid (primary key)
- title: text (not null)
- description: text (nullable)
- image_url: text (nullable) - public URL in the material-images bucket
- telegram_link: text (nullable)
- category: text (nullable) - category slug; not enforced as a foreign key
- created_by: uuid (nullable, references auth.users.id)
- status: text (default: 'published') - 'published' | 'draft' | 'archived'
- created_at: timestamp (default: now())
"""
