"""Infrastructure: HTTP transport and the gobench master API gateway."""
