"""JSON API mirroring the HTML shell."""
