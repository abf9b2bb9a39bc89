from __future__ import annotations

from app.api.pedidos.models.model_pedido import PedidoModel, TipoEntrega
from app.api.pedidos.schemas.schema_pedido import (
    EnderecoEntregaOut,
    PedidoItemOut,
    PedidoResponse,
    ResumoItemOut,
)
from app.api.pedidos.services.service_precificacao import calcular_total_do_pedido, resumo_itens
from app.utils.database_utils import quantizar_dinheiro


class PedidoResponseBuilder:
    @staticmethod
    def pedido_to_response(pedido: PedidoModel) -> PedidoResponse:
        endereco = None
        if pedido.tipo_entrega == TipoEntrega.DELIVERY:
            endereco = EnderecoEntregaOut(
                rua=pedido.entrega_rua,
                numero=pedido.entrega_numero,
                complemento=pedido.entrega_complemento,
                bairro=pedido.entrega_bairro,
                telefone=pedido.entrega_telefone,
            )

        return PedidoResponse(
            id=pedido.id,
            usuario_id=pedido.usuario_id,
            status=pedido.status,
            status_descricao=pedido.status_descricao,
            tipo_entrega=pedido.tipo_entrega,
            metodo_pagamento=pedido.metodo_pagamento,
            valor_total=quantizar_dinheiro(pedido.valor_total),
            valor_total_calculado=calcular_total_do_pedido(pedido),
            total_manual=bool(pedido.total_manual),
            taxa_entrega=quantizar_dinheiro(pedido.taxa_entrega),
            observacoes=pedido.observacoes,
            precisa_troco=bool(pedido.precisa_troco),
            valor_troco=quantizar_dinheiro(pedido.valor_troco) if pedido.valor_troco is not None else None,
            troco=quantizar_dinheiro(pedido.troco) if pedido.troco is not None else None,
            entregador_id=pedido.entregador_id,
            endereco_id=pedido.endereco_id,
            endereco_entrega=endereco,
            versao=pedido.versao,
            created_at=pedido.created_at,
            updated_at=pedido.updated_at,
            itens=[PedidoItemOut.model_validate(item) for item in pedido.itens],
            resumo_itens=[ResumoItemOut(**linha) for linha in resumo_itens(pedido.itens)],
        )
