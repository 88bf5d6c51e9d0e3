"""Query objects, query mods, SQL builders, model helpers and eager loading."""