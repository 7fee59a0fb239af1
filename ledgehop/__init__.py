"""ledgehop — reactive tile-grid agent: snapshot in, boolean control vector out."""
