"""Batch write helpers shared by the seed jobs"""
from typing import Any, Dict, List, Optional


def insert_batch(collection, documents: List[Dict], batch_size: int = 100) -> List[Dict]:
    """
    Insert documents in batches and return them with their assigned _id

    Args:
        collection: MongoDB collection
        documents: Documents to insert (without _id)
        batch_size: Batch size for insertion

    Returns:
        Copies of the inserted documents carrying their _id
    """
    inserted_docs = []

    for i in range(0, len(documents), batch_size):
        batch = documents[i:i + batch_size]
        result = collection.insert_many(batch)
        for j, doc_id in enumerate(result.inserted_ids):
            doc = batch[j].copy()
            doc['_id'] = doc_id
            inserted_docs.append(doc)

    print(f"  Inserted {len(inserted_docs)} documents into {collection.name}")
    return inserted_docs


def clear_collection(collection, query: Optional[Dict[str, Any]] = None) -> int:
    """Delete matching documents, reporting how many were removed"""
    result = collection.delete_many(query or {})
    if result.deleted_count > 0:
        print(f"  Deleted {result.deleted_count} documents from {collection.name}")
    else:
        print(f"  {collection.name} had nothing to delete")
    return result.deleted_count
