"""Compile a Gurbani corpus database into static JSON artifacts."""
