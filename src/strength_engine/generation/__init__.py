"""Program generation pipeline: validation, selection, volume and supersets."""
