"""Source templates written into scaffolded projects."""
