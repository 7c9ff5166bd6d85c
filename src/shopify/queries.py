"""GraphQL query strings for the Shopify Admin API."""

# Collections overview. The first 250 products are enough to count the
# in-stock ones for the badge; productsCount gives the real total.
QUERY_COLLECTIONS = """
query getCollections($first: Int!) {
  collections(first: $first) {
    edges {
      node {
        id
        title
        image {
          url
          altText
        }
        productsCount {
          count
        }
        products(first: 250) {
          edges {
            node {
              id
              totalInventory
            }
          }
        }
      }
    }
  }
}
"""

# One page window of a collection's products. Stock filtering happens in
# $query (collection_id:<n> AND inventory_total:...), so first/after page
# forward and last/before page backward over the filtered sequence.
# Products come back in search order (sortKey ID), not the collection's
# manual sort order; ID keeps windows stable between requests.
QUERY_COLLECTION_PRODUCTS = """
query getCollectionProducts(
  $id: ID!,
  $query: String!,
  $first: Int,
  $after: String,
  $last: Int,
  $before: String
) {
  collection(id: $id) {
    id
    title
  }
  products(first: $first, after: $after, last: $last, before: $before, query: $query,
           sortKey: ID) {
    edges {
      cursor
      node {
        id
        title
        featuredImage {
          url
          altText
        }
        priceRangeV2 {
          minVariantPrice {
            amount
            currencyCode
          }
        }
        totalInventory
        status
        variants(first: 1) {
          edges {
            node {
              id
              barcode
              inventoryItem {
                measurement {
                  weight {
                    unit
                    value
                  }
                }
              }
            }
          }
        }
      }
    }
    pageInfo {
      hasNextPage
      hasPreviousPage
      startCursor
      endCursor
    }
  }
}
"""

QUERY_PRODUCT = """
query getProduct($id: ID!) {
  product(id: $id) {
    id
    title
    description
    status
    vendor
    productType
    tags
    createdAt
    updatedAt
    totalInventory
    images(first: 10) {
      edges {
        node {
          url
          altText
        }
      }
    }
    variants(first: 100) {
      edges {
        node {
          id
          title
          sku
          price
          compareAtPrice
          inventoryQuantity
          availableForSale
          inventoryItem {
            measurement {
              weight {
                unit
                value
              }
            }
          }
        }
      }
    }
  }
}
"""
