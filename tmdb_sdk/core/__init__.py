"""
Couche domaine : ports (interfaces) et exceptions du SDK.

Le core ne depend d'aucun adaptateur. Les backends de cache et le transport
HTTP implementent les ports definis ici.
"""
