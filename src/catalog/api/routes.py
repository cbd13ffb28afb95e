import typing
import uuid

import fastapi

from catalog import mediator as catalog_mediator, response
from catalog.products import commands, models, queries

router = fastapi.APIRouter(prefix="/products", tags=["products"])


class CreatedProduct(response.Response, frozen=True):
    id: uuid.UUID


def get_mediator(request: fastapi.Request) -> catalog_mediator.Mediator:
    return request.app.state.mediator


@router.get("/{product_id}", status_code=fastapi.status.HTTP_200_OK)
async def get_product(
    product_id: uuid.UUID,
    mediator: catalog_mediator.Mediator = fastapi.Depends(get_mediator),
) -> models.ProductView:
    product = await mediator.send(queries.GetProduct(id=product_id))
    if product is None:
        raise fastapi.HTTPException(
            status_code=fastapi.status.HTTP_404_NOT_FOUND,
            detail=f"Product {product_id} not found",
        )
    return product


@router.get("", status_code=fastapi.status.HTTP_200_OK)
async def list_products(
    mediator: catalog_mediator.Mediator = fastapi.Depends(get_mediator),
) -> typing.List[models.ProductView]:
    return await mediator.send(queries.ListProducts())


@router.post("", status_code=fastapi.status.HTTP_201_CREATED)
async def create_product(
    command: commands.CreateProduct,
    http_response: fastapi.Response,
    mediator: catalog_mediator.Mediator = fastapi.Depends(get_mediator),
) -> CreatedProduct:
    product_id = await mediator.send(command)
    if product_id == uuid.UUID(int=0):
        raise fastapi.HTTPException(
            status_code=fastapi.status.HTTP_400_BAD_REQUEST,
            detail="Product identifier was not generated",
        )
    http_response.headers["Location"] = f"/products/{product_id}"
    return CreatedProduct(id=product_id)


@router.put("/{product_id}", status_code=fastapi.status.HTTP_204_NO_CONTENT)
async def update_product(
    product_id: uuid.UUID,
    command: commands.UpdateProduct,
    mediator: catalog_mediator.Mediator = fastapi.Depends(get_mediator),
) -> None:
    if command.id != product_id:
        raise fastapi.HTTPException(
            status_code=fastapi.status.HTTP_400_BAD_REQUEST,
            detail="Path id does not match body id",
        )
    await mediator.send(command)


@router.delete("/{product_id}", status_code=fastapi.status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: uuid.UUID,
    mediator: catalog_mediator.Mediator = fastapi.Depends(get_mediator),
) -> None:
    await mediator.send(commands.DeleteProduct(id=product_id))
