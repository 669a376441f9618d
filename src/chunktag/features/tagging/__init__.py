"""Tag stores and the composite facade reconciling them."""
