"""Design pattern katas: factory, builder, adapter and strategy."""
