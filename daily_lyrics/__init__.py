"""
Daily Lyrics - Song of the Day

A small FastAPI service that renders one song per calendar day: a lyric
excerpt, the track's title and artist, an embedded player and links to the
neighbouring days.  Rows live in a hosted Supabase table and are fetched on
every request; nothing is cached in process.
"""
