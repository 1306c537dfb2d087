"""Marshal roles to and from security API JSON documents."""

from osrole.domain.entities import IndexPermission, Role, TenantPermission


def to_document(role: Role) -> dict:
    """Build the PUT body. Empty optional index fields are omitted."""
    doc: dict = {
        "cluster_permissions": list(role.cluster_permissions),
        "index_permissions": [],
        "tenant_permissions": [
            {
                "tenant_patterns": list(p.tenant_patterns),
                "allowed_actions": list(p.allowed_actions),
            }
            for p in role.tenant_permissions
        ],
    }
    if role.description:
        doc["description"] = role.description
    for p in role.index_permissions:
        block: dict = {
            "index_patterns": list(p.index_patterns),
            "allowed_actions": list(p.allowed_actions),
        }
        if p.field_level_security:
            block["fls"] = list(p.field_level_security)
        if p.document_level_security:
            block["dls"] = p.document_level_security
        if p.masked_fields:
            block["masked_fields"] = list(p.masked_fields)
        doc["index_permissions"].append(block)
    return doc


def from_document(name: str, doc: dict) -> Role:
    """Build a Role from a GET document; server-only keys are ignored."""
    return Role(
        role_name=name,
        description=doc.get("description") or "",
        cluster_permissions=list(doc.get("cluster_permissions") or []),
        index_permissions=[
            IndexPermission(
                index_patterns=list(p.get("index_patterns") or []),
                allowed_actions=list(p.get("allowed_actions") or []),
                field_level_security=list(p.get("fls") or []),
                document_level_security=p.get("dls") or "",
                masked_fields=list(p.get("masked_fields") or []),
            )
            for p in doc.get("index_permissions") or []
        ],
        tenant_permissions=[
            TenantPermission(
                tenant_patterns=list(p.get("tenant_patterns") or []),
                allowed_actions=list(p.get("allowed_actions") or []),
            )
            for p in doc.get("tenant_permissions") or []
        ],
    )
